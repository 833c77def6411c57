# ads_online/core/logging_middleware.py
from fastapi import Request
from ads_online.core.logger import logger
import time
import uuid

CORRELATION_HEADER = "X-Correlation-ID"

async def log_requests(request: Request, call_next):
    """Log every request/response under a correlation id"""

    correlation_id = str(uuid.uuid4())
    start_time = time.time()

    with logger.contextualize(correlation_id=correlation_id):
        logger.info(f"--> {request.method} {request.url.path}")

        try:
            response = await call_next(request)
        except Exception as e:
            process_time = (time.time() - start_time) * 1000
            logger.error(
                f"xx {request.method} {request.url.path} "
                f"- Error: {str(e)} "
                f"- Time: {process_time:.2f}ms"
            )
            raise

        process_time = (time.time() - start_time) * 1000  # ms
        logger.info(
            f"<-- {request.method} {request.url.path} "
            f"- Status: {response.status_code} "
            f"- Time: {process_time:.2f}ms"
        )

    response.headers[CORRELATION_HEADER] = correlation_id
    return response
