"""
Serving built responses

Runs a tiny AnyIO TCP server that answers every connection with a response
made by ResponseBuilder. It doesn't read the request; one response per
connection (Connection: close).

Run:
  python examples/serve_response.py

Then try:
  curl -i http://127.0.0.1:8080/
"""

from __future__ import annotations

import anyio
from anyio.abc import SocketStream

from fauxresp import ResponseBuilder, StatusCode, write_response


async def handle_client(stream: SocketStream) -> None:
    async with stream:
        response = (
            ResponseBuilder()
            .with_status(StatusCode.OK)
            .with_json({"ok": True})
            .with_cache("+10 minutes")
            .with_added_header("Vary", "Accept")
            .with_added_header("Vary", "Accept-Encoding")
            .build()
        )
        await write_response(stream, response)


async def main() -> None:
    listener = await anyio.create_tcp_listener(local_host="127.0.0.1", local_port=8080)

    print("Listening on http://127.0.0.1:8080")
    print("Press Ctrl-C to stop.")

    async with listener:
        await listener.serve(handle_client)


if __name__ == "__main__":
    anyio.run(main)
