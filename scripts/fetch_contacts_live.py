#!/usr/bin/env python3
"""Quick live fetch against the contacts feed.

Needs GOOGLE_CONTACTS_TOKEN (or GOOGLE_CONTACTS_REFRESH_TOKEN plus
GOOGLE_CONTACTS_CLIENT_ID / GOOGLE_CONTACTS_CLIENT_SECRET).

Run:
  poetry run python scripts/fetch_contacts_live.py                 # thin projection
  poetry run python scripts/fetch_contacts_live.py full            # with phone numbers
  poetry run python scripts/fetch_contacts_live.py property-email  # custom projection
"""

import asyncio
import logging
import sys

from contacts_feed import ClientSettings, ContactsClient, ContactsError


async def run(projection: str) -> int:
    settings = ClientSettings.from_env()
    async with ContactsClient.from_settings(settings) as client:
        if not client.token:
            if not settings.refresh_token:
                print("$GOOGLE_CONTACTS_TOKEN or $GOOGLE_CONTACTS_REFRESH_TOKEN must be set")
                return 1
            await client.refresh_access_token()
            print("Refreshed access token.")

        try:
            contacts = await client.fetch_all(projection=projection)
        except ContactsError as e:
            print(f"\n⚠️ Fetch failed: {e}")
            return 1

    print(f"Got {len(contacts)} contacts ({projection} projection)")
    for i, contact in enumerate(contacts[:5], 1):
        print(f"  {i}. {contact}")
    print("\n✅ Paginated fetch succeeded.")
    return 0


def main() -> None:
    logging.basicConfig(level=logging.DEBUG if "-v" in sys.argv else logging.INFO)
    args = [a for a in sys.argv[1:] if a != "-v"]
    projection = args[0] if args else "thin"
    raise SystemExit(asyncio.run(run(projection)))


if __name__ == "__main__":
    main()
