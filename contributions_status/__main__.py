import uvicorn

from contributions_status.settings import Settings


def main() -> None:
    settings = Settings()
    uvicorn.run("contributions_status.main:app", host=settings.host, port=settings.port)


if __name__ == "__main__":
    main()
