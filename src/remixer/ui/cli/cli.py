"""Command line interface for RE-MIXER."""

import logging
from typing import final

from rich.console import Console

from remixer.application.services import OrganizeLibraryService, OrganizeRequest
from remixer.config.config import Config
from remixer.config.paths import run_log_file
from remixer.exceptions import ConfigError
from remixer.platform.logging import logger, setup_logger
from remixer.ui.cli.display import render_run_summary

EXIT_OK = 0
EXIT_FAILURE = 1
EXIT_CONFIG_ERROR = 2
EXIT_INTERRUPTED = 130


@final
class CommandProcessor:
    """Run one organizing pass from the layered configuration."""

    @staticmethod
    def process_command(
        service: OrganizeLibraryService | None = None,
        console: Console | None = None,
    ) -> int:
        """Load configuration, organize the input directory and print a summary.

        Args:
            service: Service to run (for testing).
            console: Console the summary is rendered on.

        Returns:
            int: Process exit code.
        """
        try:
            config = Config.load()
            _ = setup_logger(
                log_file=run_log_file(config.log_dir),
                console_level=logging.INFO,
            )
            request = OrganizeRequest.from_config(config)
            stats = (service or OrganizeLibraryService()).run(request)
            render_run_summary(console or Console(), stats)
            return EXIT_OK

        except ConfigError as e:
            logger.error("Configuration error: %s", str(e))
            return EXIT_CONFIG_ERROR
        except KeyboardInterrupt:
            logger.info("\nOperation cancelled by user")
            return EXIT_INTERRUPTED
        except OSError as e:
            logger.error("Filesystem error: %s", str(e))
            return EXIT_FAILURE


def main() -> int:
    """Main entry point.

    Returns:
        int: Process exit code (0 on success).
    """
    return CommandProcessor.process_command()
