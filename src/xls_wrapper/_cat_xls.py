import argparse
import csv
import logging
import sys

from xls_wrapper import Document, _get_version
from xls_wrapper import __name__ as xls_wrapper_name
from xls_wrapper.exceptions import FileError, FileFormatError

logger = logging.getLogger(xls_wrapper_name)


def command_line_parser():
    parser = argparse.ArgumentParser(description="Export data from Excel XLS workbooks")
    commands = parser.add_mutually_exclusive_group()
    commands.add_argument(
        "-S",
        "--list-sheets",
        action="store_true",
        help="List the names of sheets and exit",
    )
    commands.add_argument(
        "--records",
        action="store_true",
        help="List the number of font and style records and exit",
    )
    commands.add_argument(
        "-b",
        "--brief",
        action="store_true",
        default=False,
        help="Don't prefix data rows with name of sheet (default: false)",
    )
    parser.add_argument("-V", "--version", action="store_true")
    parser.add_argument(
        "-s", "--sheet", action="append", help="Names of sheet(s) to include in export"
    )
    parser.add_argument("document", nargs="*", help="Document(s) to export")
    parser.add_argument(
        "--debug", default=False, action="store_true", help="Enable debug logging"
    )
    return parser


def print_sheet_names(filename):
    for sheet in Document(filename).sheets:
        print(f"{filename}: {sheet.name}")


def print_record_counts(filename):
    doc = Document(filename)
    print(f"{filename}: fonts={len(doc.fonts)} styles={len(doc.styles)}")


def cell_as_string(cell):
    if cell.value is None:
        return ""
    elif isinstance(cell.value, float) and cell.value.is_integer():
        return str(int(cell.value))
    else:
        return str(cell.value)


def print_sheet(args, filename):
    writer = csv.writer(sys.stdout, dialect="excel")
    for sheet in Document(filename).sheets:
        if args.sheet is not None and sheet.name not in args.sheet:
            continue
        for row in sheet.rows():
            cells = [cell_as_string(cell) for cell in row]
            if not args.brief:
                sys.stdout.write(f"{filename}: {sheet.name}: ")
            writer.writerow(cells)


def main():
    parser = command_line_parser()
    args = parser.parse_args()

    if args.version:
        print(_get_version())
    elif len(args.document) == 0:
        parser.print_help()
    else:
        hdlr = logging.StreamHandler()
        hdlr.setFormatter(logging.Formatter("%(levelname)s:%(name)s:%(message)s"))
        logger.addHandler(hdlr)
        if args.debug:
            logger.setLevel("DEBUG")
        else:
            logger.setLevel("ERROR")
        for filename in args.document:
            try:
                if args.list_sheets:
                    print_sheet_names(filename)
                elif args.records:
                    print_record_counts(filename)
                else:
                    print_sheet(args, filename)
            except (FileError, FileFormatError) as e:
                print(f"{filename}:", str(e), file=sys.stderr)
                sys.exit(1)


if __name__ == "__main__":
    # execute only if run as a script
    main()  # pragma: no cover
