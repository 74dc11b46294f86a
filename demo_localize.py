#!/usr/bin/env python3
"""
Demo: Render localized data as a script block and as a full HTML page.
"""

import logging

from localize.examples import MOTD_BODY, build_example_map
from localize.loading import map_from_yaml
from localize.page import render_page, save_page_file


CONFIG_YAML = """
name: _pageConfig
data:
  debug: false
  retries: 3
  endpoints:
    api: /api/v1
    login: /login
  features: [search, upload]
"""


def main():
    logging.basicConfig(level=logging.DEBUG, format="%(name)s: %(message)s")

    localized = build_example_map()

    print("=" * 80)
    print("LOCALIZE DEMO")
    print("=" * 80)

    print("\nSCRIPT BLOCK:")
    print("-" * 80)
    print(localized.js())

    print("\nFROM YAML:")
    print("-" * 80)
    print(map_from_yaml(CONFIG_YAML).js())

    print("\nHTML PAGE:")
    print("-" * 80)
    print(render_page(localized, title="Hello world!", body=MOTD_BODY))

    filename = "localize_demo.html"
    save_page_file(localized, filename, title="Hello world!", body=MOTD_BODY)
    print(f"\nSaved to: {filename}")
    print("=" * 80)


if __name__ == "__main__":
    main()
