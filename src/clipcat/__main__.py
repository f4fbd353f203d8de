# src/clipcat/__main__.py
from clipcat.cli import main

if __name__ == "__main__":
    main()
