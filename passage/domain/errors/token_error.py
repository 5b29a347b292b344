"""Token error constants for the token codec.

These are NOT exceptions - they are error value constants returned inside
``Failure`` by the codec. A failure never carries partial claims.

Usage:
    from passage.domain.errors import TokenError
    from passage.core.result import Failure

    result = codec.verify(token, TokenPurpose.REFRESH)
    match result:
        case Success(value=claims):
            ...
        case Failure(error=TokenError.EXPIRED_TOKEN):
            ...
"""


class TokenError:
    """Token verification error constants.

    Every constant is a flavour of the "invalid token" condition:
        - INVALID_TOKEN: signature mismatch, wrong audience, missing claims
        - EXPIRED_TOKEN: exp claim in the past
        - MALFORMED_TOKEN: not a decodable JWT
    """

    INVALID_TOKEN = "Invalid token"
    EXPIRED_TOKEN = "Token expired"
    MALFORMED_TOKEN = "Malformed token"
