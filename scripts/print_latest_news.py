"""Print the most recently published stored news articles as JSONL."""

from __future__ import annotations

import argparse
import json
import logging

from dotenv import load_dotenv


def main() -> None:
    logging.basicConfig(level=logging.INFO, format="%(asctime)s - %(levelname)s - %(message)s")
    logger = logging.getLogger(__name__)

    load_dotenv()

    parser = argparse.ArgumentParser()
    parser.add_argument("--limit", type=int, default=20)
    parser.add_argument("--database-path", default=None)
    args = parser.parse_args()

    from common.serialization import serialize_dataclass
    from news_store.connection import configure, get_engine, get_session, init_db
    from news_store.queries import list_latest_news

    engine = get_engine(args.database_path)
    init_db(engine)
    configure(engine)

    with get_session() as session:
        headlines = list_latest_news(session, args.limit)

    if not headlines:
        logger.info("No news articles stored")
        return

    for headline in headlines:
        print(json.dumps(serialize_dataclass(headline), ensure_ascii=False))


if __name__ == "__main__":
    main()
