"""
Interfaccia a riga di comando per il toolkit dei sottotitoli
"""
import argparse
import logging
import os
import sys
from typing import List, Optional

from .config import Config
from .join import Join, JoinOptions
from .services.errors import SubtitleToolkitError
from .services.transcript import write_transcript
from .services.writer import clean_file

LOG_LEVELS = {
    'none': logging.WARNING,
    'info': logging.INFO,
    'detail': logging.DEBUG,
}

DEFAULT_CONFIG_NAMES = ('subtitle_toolkit.yml', 'subtitle_toolkit.yaml')


def find_default_config(cwd: Optional[str] = None) -> Optional[str]:
    """Restituisce il primo file di configurazione di default trovato in ``cwd``, se presente"""
    cwd = cwd or os.getcwd()
    for name in DEFAULT_CONFIG_NAMES:
        candidate = os.path.join(cwd, name)
        if os.path.exists(candidate):
            return candidate
    return None


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(prog='subtitle-toolkit', description='Clean, join and transcribe SRT subtitle files')
    parser.add_argument('--config', type=str, help='Path to the YAML configuration file')
    subparsers = parser.add_subparsers(dest='command')

    join_parser = subparsers.add_parser('join', help='Join multiple SRT files')
    join_parser.add_argument('-d', '--directory', dest='folder', type=str, help='Directory containing SRT files (default: current directory)')
    join_parser.add_argument('-f', '--files', type=str, help='File pattern (e.g., "*.srt" or "part1.srt,part2.srt")')
    join_parser.add_argument('-s', '--sort', choices=['asc', 'desc', 'inferred'], help='Sort order (asc/desc/inferred)')
    join_parser.add_argument('-b', '--buffer', dest='buffer_ms', type=int, help='Buffer between merged files in milliseconds')
    join_parser.add_argument('-o', '--output', type=str, help='Output file')
    join_parser.add_argument('-L', '--log-level', choices=list(LOG_LEVELS), help='Log level (default: info)')

    clean_parser = subparsers.add_parser('clean', help='Clean and normalize an SRT file')
    clean_parser.add_argument('-f', '--file', required=True, help='SRT file to process')
    clean_parser.add_argument('-o', '--output', required=True, help='Output file')

    transcript_parser = subparsers.add_parser('transcript', help='Convert an SRT file to a plain text transcript')
    transcript_parser.add_argument('-f', '--file', required=True, help='SRT file to process')
    transcript_parser.add_argument('-o', '--output', required=True, help='Output text file')
    transcript_parser.add_argument('-g', '--paragraph-gap', type=int, help='Newlines between subtitle blocks (default: 1)')

    return parser


def run_join(args, config: Config) -> None:
    config.update_from_args({
        'folder': args.folder,
        'files': args.files,
        'sort': args.sort,
        'buffer_ms': args.buffer_ms,
        'output': args.output,
        'log_level': args.log_level,
    }, section='join')
    options = JoinOptions.from_config(config)
    logging.getLogger().setLevel(LOG_LEVELS.get(options.log_level, logging.INFO))
    merged = Join(options).join()
    print(f"Joined {len(merged)} subtitles into {options.output}")


def run_clean(args, config: Config) -> None:
    output = clean_file(args.file, args.output)
    print(f"Processed file written to {output}")


def run_transcript(args, config: Config) -> None:
    config.update_from_args({'paragraph_gap': args.paragraph_gap}, section='transcript')
    gap = (config.get('transcript') or {}).get('paragraph_gap', 1)
    output = write_transcript(args.file, args.output, paragraph_gap=gap)
    print(f"Transcript written to {output}")


COMMANDS = {
    'join': run_join,
    'clean': run_clean,
    'transcript': run_transcript,
}


def main(argv: Optional[List[str]] = None) -> int:
    """Funzione principale CLI; restituisce il codice di uscita"""
    # Minimal logging setup; services use logging for diagnostics.
    logging.basicConfig(level=logging.INFO, format='%(levelname)s %(name)s: %(message)s')
    parser = build_parser()
    args = parser.parse_args(argv)

    if not args.command:
        parser.print_help()
        return 2

    try:
        config = Config(config_file=args.config or find_default_config())
        COMMANDS[args.command](args, config)
    except (SubtitleToolkitError, OSError) as e:
        print(f"Error: {e}", file=sys.stderr)
        return 1
    return 0


if __name__ == "__main__":
    sys.exit(main())
