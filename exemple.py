import logging
import os

from ead3 import EAD3Error, load, save
from ead3.common import P
from ead3.sections import ProcessInfo

logging.basicConfig(level=logging.INFO, format="%(levelname)s %(name)s: %(message)s")

# 1. Define file paths
# The input file is in the tests/fixtures directory
INPUT_FILE = os.path.join('tests', 'fixtures', 'full.xml')
OUTPUT_FILE = 'full_normalized.xml'

print(f"Loading EAD3 file: {INPUT_FILE}")

# 2. Load the document
# Malformed or incomplete documents raise an EAD3Error subclass.
try:
    doc = load(INPUT_FILE)
except FileNotFoundError:
    print(f"Error: Input file not found at {INPUT_FILE}")
    exit(1)
except EAD3Error as e:
    print(f"The file is not a usable EAD3 document: {e}")
    exit(1)

print(f"Document {doc.control.recordid} loaded successfully. Starting normalization...")

# 3. Perform some normalization tasks

# Change the 'level' attribute of <archdesc> to 'recordgrp'
level_before = doc.archdesc.level
doc.archdesc.level = "recordgrp"
print(f"- Changed <archdesc> level from '{level_before}' to '{doc.archdesc.level}'.")

# Add a <processinfo> section to describe the normalization
doc.archdesc.processinfo.append(ProcessInfo(blocks=[P(value="Normalized with the <emph>ead3</emph> package.")]))
print("- Added <processinfo> section.")

# List the components of the inventory
for series in doc.archdesc.dsc.c01:
    print(f"- Series {series.id}: {series.did.unittitle[0]} ({len(series.c02)} files)")

# 4. Save, in UTF-8 by default
save(doc, OUTPUT_FILE)

print(f"\nNormalization complete. Saved output to: {OUTPUT_FILE}")

# 5. Export a JSON view of the document
with open('full_normalized.json', 'w', encoding='utf-8') as f:
    f.write(doc.to_json(indent=2))
print("Saved JSON view to: full_normalized.json")
