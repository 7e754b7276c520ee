from flashdeck.infrastructure.common.schemas.response_wrappers import SuccessResponse

__all__ = ["SuccessResponse"]
