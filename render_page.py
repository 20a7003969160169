"""Render the page against a running content server and write the result to disk."""
import argparse
import asyncio
import logging
import sys
from pathlib import Path

import httpx

from page_controller import PageController
from settings import EXPORT_HTML, LOG_FORMAT, PORT

log = logging.getLogger("page_controller")


async def render_site(base_url, output: Path, transport=None):
    async with httpx.AsyncClient(base_url=base_url, transport=transport) as client:
        controller = PageController(client)
        await controller.load()
        html = controller.render_document()

    output.parent.mkdir(parents=True, exist_ok=True)
    output.write_text(html, encoding="utf-8")
    log.info("Wrote %s (%d bytes)", output, len(html))


def main(argv=None):
    parser = argparse.ArgumentParser(description=__doc__)
    parser.add_argument("--base-url", default=f"http://localhost:{PORT}")
    parser.add_argument("--output", type=Path, default=EXPORT_HTML)
    args = parser.parse_args(argv)

    logging.basicConfig(level=logging.INFO, format=LOG_FORMAT)
    try:
        asyncio.run(render_site(args.base_url, args.output))
    except OSError as e:
        log.error("Could not write %s: %s", args.output, e)
        return 1
    return 0


if __name__ == "__main__":
    sys.exit(main())
