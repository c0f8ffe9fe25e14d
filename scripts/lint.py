"""
Lint script runner.

Usage:
    python -m scripts.lint
"""
import subprocess

TARGETS = ["./cocolang", "./coco.py", "./scripts"]


def main():
    """
    Lint the Coco project using flake8 and pylint.
    """
    print("Running flake8...")
    subprocess.run([
        "flake8",
        *TARGETS,
        "--max-line-length=100",
        "--exclude=cocolang/tests",
    ], check=True)

    print("Running pylint...")
    subprocess.run([
        "pylint",
        *TARGETS,
        "--ignore=tests",
    ], check=True)


if __name__ == "__main__":
    main()
