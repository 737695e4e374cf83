import uuid

from api.schemas import DefaultResponse
from core.logging import logger

SUCCESS_STATUS = "SUCCESS"


def build_default_response() -> DefaultResponse:
    """Builds the canned example response with a freshly generated identifier."""
    response = DefaultResponse(status=SUCCESS_STATUS, uuid=uuid.uuid4())
    logger.info(f"Built example response with uuid: {response.uuid}")
    return response
