import uvicorn

from storefinder.core.config import settings


def main() -> None:
    uvicorn.run("storefinder.main:app", host=settings.HOST, port=settings.PORT)


if __name__ == "__main__":
    main()
