"""Main entry point for running the receipt splitter"""
import sys
import dotenv

from receipt_split.cli import main

dotenv.load_dotenv()

if __name__ == "__main__":
    sys.exit(main())
