import os
import sys
from alembic.config import CommandLine

ALEMBIC_INI = os.path.join(os.path.dirname(os.path.abspath(__file__)), "alembic.ini")

def main():
    cli = CommandLine(prog="todo-lists-migrate")
    args = sys.argv[1:] or ["upgrade", "head"]
    if "-c" not in args and "--config" not in args:
        args = ["-c", ALEMBIC_INI] + args
    cli.main(args)

if __name__ == "__main__":
    main()
