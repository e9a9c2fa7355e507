from solver import run_solver
import multiprocessing
import sys


def main():
    multiprocessing.freeze_support()
    sys.exit(run_solver(sys.argv[1:]))


if __name__ == '__main__':
    main()
