"""
Run the demonstration driver:

    py -m polytype -h

will explain all the arguments.
"""
from .cmdline import main

main()
