# dyelab/__main__.py
"""
Enable running the package as a module: python -m dyelab

Equivalent to:
    dyelab [streamlit args...]
"""

from dyelab import main

if __name__ == "__main__":
    main()
