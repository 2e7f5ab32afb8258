import argparse
import sys

import uvicorn

from bobassistant.server_app import create_app, ServerSettings


class LocalServer:
    def __init__(self, settings: ServerSettings) -> None:
        self.settings = settings
        self.app = create_app(settings=self.settings)

    def start(self) -> None:
        uvicorn.run(
            self.app,
            host=self.settings.server_ip,
            port=self.settings.server_port,
            log_level=self.settings.log_level.lower(),
        )


def main(argv=None):
    defaults = ServerSettings()
    parser = argparse.ArgumentParser(description="Start the BoB Assistant payload decoding server.")
    parser.add_argument("--ip", type=str, default=defaults.server_ip, help="IP address to bind the server to.")
    parser.add_argument("--port", type=int, default=defaults.server_port, help="Port to run the server on.")

    args = parser.parse_args(argv)
    server = LocalServer(defaults.model_copy(update={"server_ip": args.ip, "server_port": args.port}))
    server.start()
    return 0


if __name__ == "__main__":
    sys.exit(main())
