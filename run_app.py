import uvicorn


def main() -> None:
    """Serve the IP Location Finder API with uvicorn."""
    uvicorn.run(
        "ipfinder.main:app",
        host="127.0.0.1",
        port=8000,
        reload=True,
    )


if __name__ == "__main__":
    main()
