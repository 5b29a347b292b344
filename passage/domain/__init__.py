"""Domain layer - Pure business logic.

Entities, enums, protocols (ports) and validators. The domain layer has NO
dependencies on any framework or infrastructure.

Structure:
- entities/: User, Session, VerificationCode
- enums/: CodePurpose, TokenPurpose
- errors/: Token error constants
- protocols/: Repository and service interfaces (ports)
- validators/ and types.py: Request pre-conditions as Annotated types
"""
