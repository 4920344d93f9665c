import uvicorn

from file_editor.config.settings import settings


def main(argv: list[str] | None = None) -> int:
    # Run FastAPI app from file_editor.main:app
    uvicorn.run(
        "file_editor.main:app",
        host=settings.host,
        port=settings.port,
        reload=settings.reload,
    )
    return 0


if __name__ == "__main__":  # pragma: no cover
    raise SystemExit(main())
