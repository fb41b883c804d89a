# app/scripts/seed_messages.py

import argparse

from app.core.config import settings
from app.core.logger import logger
from app.services.messages_client import MessagesClient

SAMPLE_BODIES = [
    "Hello from the seed script!",
    "Is anyone else here?",
    "Testing cross-origin requests.",
    "Another day, another message.",
    "This board works.",
]


def seed(client: MessagesClient, count: int, username: str) -> list:
    created = []
    for i in range(count):
        body = SAMPLE_BODIES[i % len(SAMPLE_BODIES)]
        created.append(client.post_message(username, body))
    return created


def main(argv=None):
    parser = argparse.ArgumentParser(description="Post sample messages to a running API")
    parser.add_argument("--base-url", default=settings.API_BASE_URL)
    parser.add_argument("--count", type=int, default=5)
    parser.add_argument("--username", default="seed-bot")
    args = parser.parse_args(argv)

    with MessagesClient(base_url=args.base_url) as client:
        created = seed(client, args.count, args.username)
    logger.info("Inserted %d messages into %s", len(created), args.base_url)
    return created


if __name__ == "__main__":
    main()
