from billed.cli.app import main_menu
from billed.db import close_db, initialize_db
from billed.logging import configure_logging, reconfigure
from billed.settings import settings


def main() -> None:
    configure_logging()
    if settings.store_backend == "local":
        initialize_db()
        reconfigure()
    try:
        main_menu()
    finally:
        close_db()


if __name__ == "__main__":
    main()
