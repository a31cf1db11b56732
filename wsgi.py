import click
from dotenv import load_dotenv

from voterapi import create_app
from voterapi.config import Config

load_dotenv()

application = create_app()


@click.command(context_settings={"help_option_names": ["--help"]})
@click.option("-h", "--host", default=Config.HOST, show_default=True, help="Interface to listen on.")
@click.option("-p", "--port", default=Config.PORT, type=click.IntRange(0, 65535), show_default=True, help="Port to listen on.")
def main(host, port):
    """Run the voter API server."""
    # Flask's default handler already writes to stderr
    application.logger.setLevel(Config.LOG_LEVEL)
    application.logger.info("Starting server on %s:%d", host, port)
    application.run(host=host, port=port)


if __name__ == "__main__":
    main()
