import argparse
import sys

from .errors import ConversionError
from .wp_export2md import convert_export, convert_wxr2md, read_export_file


def print_stats(stats, stream=None):
    stream = stream or sys.stdout
    stream.write(f"Articoli: {stats.posts}\n")
    stream.write(f"Pagine: {stats.pages}\n")
    stream.write(f"Categorie: {stats.categories}\n")
    stream.write(f"Tag: {stats.tags}\n")


def main(argv=None):
    parser = argparse.ArgumentParser(description='Convert WordPress WXR export to a Markdown document')
    parser.add_argument('xml_file', help='Path to WordPress XML export file (.xml)')
    parser.add_argument('md_file', nargs='?', help='Path where the Markdown file will be saved (default: derived from the site title)')
    parser.add_argument('--yaml', dest='yaml_file', help='Also dump the extracted records to this YAML file')
    parser.add_argument('--stats', action='store_true', help='Print post, page, category and tag counts (to stderr with --stdout)')
    parser.add_argument('--stdout', action='store_true', help='Print the Markdown instead of writing a file')
    parser.add_argument('--quiet', action='store_true', help='Do not print progress messages')

    args = parser.parse_args(argv)

    if args.stdout and (args.md_file or args.yaml_file):
        parser.error('--stdout cannot be combined with md_file or --yaml')

    try:
        if args.stdout:
            result = convert_export(read_export_file(args.xml_file))
            sys.stdout.write(result.markdown)
        else:
            result = convert_wxr2md(
                args.xml_file,
                args.md_file,
                yaml_filepath=args.yaml_file,
                verbose=not args.quiet,
            )
    except ConversionError as e:
        sys.stderr.write(f"Errore: {e.message}\n")
        return 1
    except OSError as e:
        sys.stderr.write(f"Errore durante la scrittura del file: {e}\n")
        return 1

    if args.stats:
        # keep the counts out of the Markdown stream
        print_stats(result.stats, sys.stderr if args.stdout else sys.stdout)
    return 0
