import sys

from json_loop_tree.cli import main

if __name__ == "__main__":
    sys.exit(main())
