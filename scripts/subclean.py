import os
import sys

sys.path.insert(0, os.path.dirname(os.path.dirname(os.path.abspath(__file__))))

from check_imports import check_required_imports
check_required_imports(['PySubclean', 'regex', 'srt', 'blinker'])

from PySubclean.CommandLine import main

if __name__ == '__main__':
    raise SystemExit(main())
