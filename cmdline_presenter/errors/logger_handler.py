"""
    LoggerErrorHandler
"""
from cmdline_presenter.errors.base import ErrorHandler
from cmdline_presenter.errors.exceptions import ApplicationError
from cmdline_presenter.logging.base import Logger


class LoggerErrorHandler(ErrorHandler):
    """Handler qui consigne les erreurs dans le journal de diagnostic."""

    def __init__(
        self,
        logger: Logger,
        base_error_type: type[Exception] = ApplicationError
    ) -> None:
        """Initialise le handler avec un journal.

        Args:
            logger: Journal recevant les erreurs.
            base_error_type: Classe de base des erreurs connues.
        """
        self.logger = logger
        self.base_error_type = base_error_type

    def handle(self, error: Exception) -> None:
        if isinstance(error, self.base_error_type):
            self.logger.log_error(f"{type(error).__name__}: {error}")
        else:
            self.logger.log_error(
                f"Erreur inattendue: {type(error).__name__}: {error}"
            )
