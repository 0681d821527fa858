from cli import cli
from utils.logger_utils import configure_logging

configure_logging()

if __name__ == "__main__":
    cli()
