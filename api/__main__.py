"""python -m api – chạy server bằng uvicorn (HOST/PORT từ env)."""
import uvicorn

from .deps import get_settings


def run() -> None:
    settings = get_settings()
    uvicorn.run(
        "api.main:app",
        host=settings.host,
        port=settings.port,
        log_level=settings.log_level.lower(),
    )


if __name__ == "__main__":
    run()
