"""Entry point for the Video Gateway service."""

if __name__ == "__main__":
    import sys
    import uvicorn
    from gateway.core.config import settings
    from gateway.core.exceptions import ConfigurationError
    from gateway.utils.logging import LoggerSetup, CorrelatedLogger

    LoggerSetup.setup_logging()
    logger = CorrelatedLogger("gateway")

    try:
        settings.validate()
    except ConfigurationError as e:
        logger.error(f"Refusing to start: {e.message}")
        sys.exit(1)

    logger.info(f"Starting {settings.api_title} v{settings.api_version}")
    logger.info(f"Video providers: {settings.provider_names()['video']}")
    logger.info(f"Search providers: {settings.provider_names()['search']}")
    logger.info(f"Upstream timeout: {settings.upstream_timeout_seconds}s")

    uvicorn.run(
        "gateway.main:app",  # Use string import for hot reload
        host=settings.host,
        port=settings.port,
        reload=settings.debug_mode,
        log_level=settings.log_level.lower()
    )
