"""
Application Initialization
==========================
This module constructs the Model-View pair and starts the Qt Event Loop.

Why is this file needed?
------------------------
It acts as the "Dependency Injection" root. It:
1. Sets up logging.
2. Instantiates the data model (LogBook).
3. Instantiates the Main Window (View), passing the model in.
"""
import logging
import sys
from typing import Optional, Sequence

from ghanfoot.application import create_app
from ghanfoot.logging_config import setup_logging
from ghanfoot.model.state import LogBook
from ghanfoot.view.main_window import MainWindow

logger = logging.getLogger(__name__)


def main(
    argv: Optional[Sequence[str]] = None,
    level: Optional[int] = None,
    log_file: Optional[str] = None,
) -> int:
    # 1. Setup Logging (Console + Optional File)
    setup_logging(level=level, log_file=log_file)

    # 2. Create the Qt Application
    app = create_app(sys.argv if argv is None else argv)

    # 3. Initialize the Data Model
    log_book = LogBook()

    # 4. Initialize the Main Window, passing the model
    window = MainWindow(log_book)
    window.show()
    logger.info("Main window shown.")

    # 5. Start Event Loop
    return app.exec()


if __name__ == "__main__":
    sys.exit(main())
