import argparse
import asyncio
import logging
import sys

import aiohttp

from hubspot_cli_lib.config import get_github_token
from hubspot_cli_lib.errors import CliLibError
from hubspot_cli_lib.mirror import download_github_repo_contents

logger = logging.getLogger('hubspot_cli_lib')

parser = argparse.ArgumentParser(
    prog='python -m hubspot_cli_lib',
    description='Mirror a path of a GitHub repository into a local directory.',
)
parser.add_argument('repository', help='owner/name')
parser.add_argument('source_path', help='path inside the repository')
parser.add_argument('download_path')
parser.add_argument('--ref', help='branch, tag or commit (default branch if omitted)')
parser.add_argument('--token', help='GitHub token (defaults to $GITHUB_TOKEN)')
parser.add_argument('-v', '--verbose', action='store_true')
parser.add_argument('-t', '--tasks', type=int, default=None)


async def main(argv: list[str] | None = None) -> int:
    args = parser.parse_args(argv)
    logging.basicConfig(
        level=logging.DEBUG if args.verbose else logging.INFO,
        format='%(asctime)s: %(message)s',
    )
    try:
        await download_github_repo_contents(
            args.repository,
            args.source_path,
            args.download_path,
            ref=args.ref,
            token=args.token or get_github_token(),
            tasks_limit=args.tasks,
        )
    except (CliLibError, aiohttp.ClientError, asyncio.TimeoutError, OSError, ValueError) as err:
        logger.error('%s', err)
        return 1
    logger.info('Downloaded %s/%s to %s', args.repository, args.source_path, args.download_path)
    return 0


if __name__ == '__main__':
    sys.exit(asyncio.run(main()))
