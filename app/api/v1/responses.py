from fastapi import status
from fastapi.responses import JSONResponse

from app.core.exceptions import ERROR_STATUS
from app.models.result import OperationResult


def result_response(result: OperationResult) -> JSONResponse:
    """Render an OperationResult, mapping a failure to its HTTP status."""
    status_code = status.HTTP_200_OK
    if not result.success:
        status_code = ERROR_STATUS.get(result.error, status.HTTP_400_BAD_REQUEST)
    return JSONResponse(status_code=status_code, content=result.model_dump(mode="json"))
