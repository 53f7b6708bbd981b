"""
SampleToken Deployer - Main Entry Point
Compiles sample.sol, deploys SampleToken, then reads and writes it once
"""

import os
import sys
from loguru import logger

from deployer.deployment_runner import DeploymentRunner
from utils.config_loader import load_config
from utils.exceptions import DeploymentError, KeyFileNotFoundError


EXIT_OK = 0
EXIT_MISSING_KEY = 1
EXIT_DEPLOYMENT_FAILED = 2


def configure_logging(level: str = "INFO", log_file: str = "data/logs/deploy.log"):
    """Configure loguru sinks"""
    logger.remove()
    logger.add(
        sys.stderr,
        format="<green>{time:YYYY-MM-DD HH:mm:ss}</green> | <level>{level: <8}</level> | <cyan>{name}</cyan>:<cyan>{function}</cyan> - <level>{message}</level>",
        level=level
    )
    if log_file:
        os.makedirs(os.path.dirname(log_file) or '.', exist_ok=True)
        logger.add(
            log_file,
            rotation="1 day",
            retention="7 days",
            format="{time:YYYY-MM-DD HH:mm:ss} | {level: <8} | {name}:{function} - {message}",
            level="DEBUG"
        )


def main(config_path: str = "config/deploy_config.json") -> int:
    """
    Main entry point

    Returns:
        Process exit status
    """
    try:
        config = load_config(config_path)
    except DeploymentError as e:
        logger.error(f"Configuration error: {e}")
        return EXIT_DEPLOYMENT_FAILED

    runner = DeploymentRunner(config)

    try:
        runner.run()
    except KeyFileNotFoundError as e:
        logger.error(str(e))
        return EXIT_MISSING_KEY
    except DeploymentError as e:
        logger.error(f"Deployment failed at stage {runner.stage.name}: {e}")
        return EXIT_DEPLOYMENT_FAILED

    return EXIT_OK


if __name__ == "__main__":
    configure_logging()

    try:
        sys.exit(main())
    except KeyboardInterrupt:
        logger.info("Interrupted by user")
        sys.exit(130)
    except Exception as e:
        logger.opt(exception=e).critical(f"Fatal error in main: {e}")
        raise
