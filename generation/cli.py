import argparse
import asyncio
import logging
from pathlib import Path

from dotenv import load_dotenv

from logging_config import setup_logging
from retrieval.config import RetrievalConfig
from retrieval.exceptions import RetrievalError

from .config import GenerationConfig
from .exceptions import GenerationError
from .service import AssistantService


def parse_args(argv: list[str] | None = None) -> argparse.Namespace:
    p = argparse.ArgumentParser(description="Zai chat with retrieval-grounded context")
    p.add_argument("--reference", help="Path to the reference corpus (default: ZAI_REFERENCE_PATH)")
    p.add_argument("--library", help="Path to the library corpus (default: ZAI_LIBRARY_PATH)")
    p.add_argument("--k", type=int, default=None, help="Chunks per corpus")
    p.add_argument("--env-file", default=".env")
    p.add_argument("--log-file", default=None)
    p.add_argument("--verbose", action="store_true")
    return p.parse_args(argv)


async def repl(service: AssistantService, k: int | None) -> None:
    print("Zai chat (retrieval + generation)")
    print("Type a question, or 'exit' to quit.")

    while True:
        try:
            query = (await asyncio.to_thread(input, "\n> ")).strip()
        except EOFError:
            print()
            break
        if not query:
            continue
        if query.lower() in {"exit", "quit"}:
            break

        try:
            response = await service.ask(query, k_per_corpus=k)
        except (GenerationError, RetrievalError) as e:
            print(f"Error: {e}")
            continue
        print(response.answer)


def main(argv: list[str] | None = None) -> None:
    args = parse_args(argv)
    if Path(args.env_file).exists():
        load_dotenv(args.env_file)

    setup_logging(
        level=logging.DEBUG if args.verbose else logging.INFO,
        log_file=Path(args.log_file) if args.log_file else None,
    )

    service = AssistantService(
        retrieval_config=RetrievalConfig.from_env(),
        generation_config=GenerationConfig.from_env(),
    )
    try:
        service.initialize_from_files(args.reference, args.library)
    except RetrievalError as e:
        print(f"Error: {e}")
        raise SystemExit(1) from e

    try:
        asyncio.run(repl(service, args.k))
    except KeyboardInterrupt:
        print()


if __name__ == "__main__":
    main()
