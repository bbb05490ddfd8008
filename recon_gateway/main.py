import uvicorn

from recon_gateway.api.app import create_app
from recon_gateway.config.settings import Settings
from recon_gateway.logging.logger import Log


def main() -> None:
    """Entry point: load settings -> configure logging -> build app -> serve."""
    settings = Settings()
    Log.configure(settings.log_level)
    app = create_app(settings)
    Log.info(f"Reconciliation gateway starting in '{settings.app_env}' mode")
    uvicorn.run(app, host=settings.api_host, port=settings.api_port)


if __name__ == "__main__":
    main()
