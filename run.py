# run.py
import sys

from gcp_credcheck.main import main

if __name__ == "__main__":
    sys.exit(main())
