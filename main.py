# main.py

import argparse
import queue
import sys
from datetime import datetime, timezone

import config
from errors import ConfigurationError, TraversalError
from hasher import SUPPORTED_ALGOS, resolve_hash
from logging_config import setup_logger
from monitor import watch
from recurser import RecursiveHashBuilder
from report import ResultWriter


def build_parser():
    parser = argparse.ArgumentParser(
        prog="recsum",
        usage="%(prog)s [OPTIONS] FILE...",
        description="recsum is a tool for recursively generating hash sums",
    )
    parser.add_argument("paths", nargs="+", metavar="FILE", help="Files or directories to hash")
    parser.add_argument("-o", "--output", default="-", help="Output file path (default: stdout)")
    parser.add_argument("-a", "--algorithm", default=config.HASH_ALGO,
                        help=f"Hash algorithm to use [{', '.join(SUPPORTED_ALGOS)}]"
                             " (-h is reserved for help)")
    parser.add_argument("-w", "--workers", type=int, default=config.WORKERS, help="Simultaneous workers")
    parser.add_argument("-v", "--verbose", action="store_true", help="Verbose")
    parser.add_argument("--watch", action="store_true", help="Keep re-hashing files as they change")
    parser.add_argument("--version", action="version", version=f"%(prog)s {config.VERSION}")
    return parser


def main(argv=None):
    args = build_parser().parse_args(argv)
    logger = setup_logger("recsum", verbose=args.verbose)

    results = queue.Queue(maxsize=config.OUTPUT_QUEUE_SIZE)
    try:
        hash_new = resolve_hash(args.algorithm)
        builders = [RecursiveHashBuilder(path, hash_new, results, args.workers) for path in args.paths]
    except ConfigurationError as e:
        logger.error("%s", e)
        return 2

    if args.output == "-":
        out = sys.stdout
    else:
        try:
            out = open(args.output, "w", encoding="utf-8")
        except OSError as e:
            logger.error("Cannot open output file '%s': %s", args.output, e)
            return 1

    writer = ResultWriter(results, out, verbose=args.verbose)
    writer.start()

    status = 0
    start = datetime.now(timezone.utc)
    try:
        for builder in builders:
            try:
                builder.walk()
            except TraversalError as e:
                logger.error("%s", e)
                status = 1
        if args.watch:
            watch(args.paths, hash_new, results)
    finally:
        writer.close()
        if out is not sys.stdout:
            out.close()
    end = datetime.now(timezone.utc)
    if writer.error is not None:
        status = 1

    if args.output != "-":
        logger.info("Output written to '%s'", args.output)
    if args.verbose or args.output != "-":
        logger.info("Completed in %s", end - start)
    return status


if __name__ == "__main__":
    sys.exit(main())
