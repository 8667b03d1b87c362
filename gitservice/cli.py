#!/usr/bin/env python3
"""gitsvc CLI entrypoint."""

import argparse
import asyncio
import logging
import sys
from pathlib import Path

from rich.console import Console
from rich.table import Table

from gitservice.git.errors import GitError
from gitservice.lib import validate
from gitservice.lib.config import load_config
from gitservice.service import GitService

console = Console()


def _error(message: str) -> None:
    print(f"ERROR: {message}", file=sys.stderr)


async def cmd_available(service: GitService, args) -> int:
    available = await service.is_available()
    print("git is available" if available else "git is not available")
    return 0 if available else 1


async def cmd_status(service: GitService, args) -> int:
    status = await service.status(args.repo)
    if not status.is_repository:
        _error(f"{status.error}: {args.repo}")
        return 1

    print(f"On branch {status.branch or '(unknown)'}")
    print(f"Last commit: {status.last_commit}")
    for title, paths in (
        ("Staged", status.staged),
        ("Unstaged", status.unstaged),
        ("Untracked", status.untracked),
    ):
        if paths:
            print(f"{title}:")
            for path in paths:
                print(f"  {path}")
    return 0


async def cmd_log(service: GitService, args) -> int:
    commits = await service.log(args.repo, args.max_count)
    if not commits:
        print("No commits")
        return 0

    table = Table("Commit", "Author", "When", "Subject")
    for c in commits:
        table.add_row(c.short_hash, f"{c.author} <{c.email}>", c.relative_date, c.subject)
    console.print(table)
    return 0


async def cmd_branches(service: GitService, args) -> int:
    table = Table("", "Branch")
    for b in await service.list_branches(args.repo):
        table.add_row("*" if b.is_current else "", b.name)
    console.print(table)
    return 0


async def cmd_branch(service: GitService, args) -> int:
    if args.create:
        await service.create_branch(args.repo, args.name)
        print(f"Created and switched to {args.name}")
    else:
        await service.switch_branch(args.repo, args.name)
        print(f"Switched to {args.name}")
    return 0


async def cmd_remotes(service: GitService, args) -> int:
    table = Table("Remote", "Fetch", "Push")
    for r in await service.list_remotes(args.repo):
        table.add_row(r.name, r.fetch_url or "", r.push_url or "")
    console.print(table)
    return 0


async def cmd_init(service: GitService, args) -> int:
    await service.init(args.repo)
    print(f"Initialized repository in {args.repo}")
    return 0


async def cmd_add(service: GitService, args) -> int:
    await service.stage_files(args.repo, args.paths)
    return 0


async def cmd_reset(service: GitService, args) -> int:
    await service.unstage_files(args.repo, args.paths)
    return 0


async def cmd_commit(service: GitService, args) -> int:
    commit_hash = await service.commit(args.repo, args.message, args.author)
    print(commit_hash)
    return 0


async def cmd_diff(service: GitService, args) -> int:
    if args.staged:
        output = await service.staged_diff(args.repo, args.path)
    else:
        output = await service.diff(args.repo, args.path)
    if output:
        print(output)
    else:
        print("No staged changes" if args.staged else "No unstaged changes")
    return 0


async def cmd_discard(service: GitService, args) -> int:
    await service.discard_changes(args.repo, args.path)
    return 0


async def cmd_clone(service: GitService, args) -> int:
    await service.clone(args.url, args.path)
    print(f"Cloned {args.url} into {args.path}")
    return 0


async def cmd_push(service: GitService, args) -> int:
    output = await service.push(args.repo, args.remote, args.branch)
    if output:
        print(output)
    return 0


async def cmd_pull(service: GitService, args) -> int:
    output = await service.pull(args.repo, args.remote, args.branch)
    if output:
        print(output)
    return 0


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(prog='gitsvc', description='Structured git operations')
    parser.add_argument('--repo', '-C', type=Path, default=Path('.'), help='Repository path (default: .)')
    parser.add_argument('--env-file', type=Path, help='Load settings from a KEY=value file')
    parser.add_argument('--verbose', '-v', action='store_true', help='Log every git invocation')

    subparsers = parser.add_subparsers(dest='command', required=True)

    p_available = subparsers.add_parser('available', help='Check that git can be run')
    p_available.set_defaults(func=cmd_available)

    p_status = subparsers.add_parser('status', help='Show branch, changes and last commit')
    p_status.set_defaults(func=cmd_status)

    p_log = subparsers.add_parser('log', help='Show recent commits')
    p_log.add_argument('--max-count', '-n', type=int, default=10, help='Number of commits (default: 10)')
    p_log.set_defaults(func=cmd_log)

    p_branches = subparsers.add_parser('branches', help='List branches')
    p_branches.set_defaults(func=cmd_branches)

    p_branch = subparsers.add_parser('branch', help='Switch to a branch')
    p_branch.add_argument('name', help='Branch name')
    p_branch.add_argument('--create', '-b', action='store_true', help='Create the branch first')
    p_branch.set_defaults(func=cmd_branch)

    p_remotes = subparsers.add_parser('remotes', help='List remotes and their URLs')
    p_remotes.set_defaults(func=cmd_remotes)

    p_init = subparsers.add_parser('init', help='Create an empty repository')
    p_init.set_defaults(func=cmd_init)

    p_add = subparsers.add_parser('add', help='Stage files (everything if none given)')
    p_add.add_argument('paths', nargs='*', help='Files to stage')
    p_add.set_defaults(func=cmd_add)

    p_reset = subparsers.add_parser('reset', help='Unstage files (everything if none given)')
    p_reset.add_argument('paths', nargs='*', help='Files to unstage')
    p_reset.set_defaults(func=cmd_reset)

    p_commit = subparsers.add_parser('commit', help='Commit staged changes')
    p_commit.add_argument('--message', '-m', required=True, help='Commit message')
    p_commit.add_argument('--author', help='Override author ("Name <email>")')
    p_commit.set_defaults(func=cmd_commit)

    p_diff = subparsers.add_parser('diff', help='Show changes to a file')
    p_diff.add_argument('path', help='File path relative to the repository')
    p_diff.add_argument('--staged', action='store_true', help='Show staged changes instead')
    p_diff.set_defaults(func=cmd_diff)

    p_discard = subparsers.add_parser('discard', help='Restore a file to HEAD')
    p_discard.add_argument('path', help='File path relative to the repository')
    p_discard.set_defaults(func=cmd_discard)

    p_clone = subparsers.add_parser('clone', help='Clone a repository')
    p_clone.add_argument('url', help='Repository URL')
    p_clone.add_argument('path', type=Path, help='Target directory')
    p_clone.set_defaults(func=cmd_clone)

    for name, func, help_text in (
        ('push', cmd_push, 'Push to a remote'),
        ('pull', cmd_pull, 'Pull from a remote'),
    ):
        p = subparsers.add_parser(name, help=help_text)
        p.add_argument('--remote', default='origin', help='Remote name (default: origin)')
        p.add_argument('--branch', help='Branch name (default: current)')
        p.set_defaults(func=func)

    return parser


def main(argv: list[str] | None = None) -> int:
    args = build_parser().parse_args(argv)

    try:
        config = load_config(args.env_file)
    except (FileNotFoundError, ValueError, validate.ValidationError) as e:
        _error(f"Invalid configuration: {e}")
        return 2

    logging.basicConfig(
        level=logging.DEBUG if args.verbose else config.log_level,
        format='%(levelname)s %(name)s: %(message)s',
    )

    service = GitService(config)
    try:
        return asyncio.run(args.func(service, args))
    except GitError as e:
        _error(str(e).strip())
        return 1


if __name__ == '__main__':
    sys.exit(main())
