import os
import sys

# Allow running from a checkout without installing the package
sys.path.append(os.path.abspath(os.path.join(os.path.dirname(__file__), "..")))

from treasury_ops.__main__ import main

if __name__ == "__main__":
    raise SystemExit(main())
