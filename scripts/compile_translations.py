#!/usr/bin/env python
"""Compile PO files to MO files

Usage: python scripts/compile_translations.py [locale]
"""
import os
import sys

from babel.messages import mofile, pofile

repo_root = os.path.dirname(os.path.dirname(os.path.abspath(__file__)))


def compile_messages(locale='pl'):
    catalog_dir = os.path.join(repo_root, 'translations', locale, 'LC_MESSAGES')
    po_file = os.path.join(catalog_dir, 'messages.po')
    mo_file = os.path.join(catalog_dir, 'messages.mo')

    print(f"Reading {po_file}...")
    with open(po_file, 'r', encoding='utf-8') as f:
        catalog = pofile.read_po(f, locale=locale)

    print(f"Writing {mo_file}...")
    with open(mo_file, 'wb') as f:
        mofile.write_mo(f, catalog)

    print("Done!")


if __name__ == '__main__':
    compile_messages(sys.argv[1] if len(sys.argv) > 1 else 'pl')
