"""
Simple test runner that loads .env.test and runs pytest
"""
import subprocess
from dotenv import load_dotenv


def main():
    # Load environment variables from .env.test
    print("Loading test environment variables...")
    load_dotenv(".env.test")

    print("Running tests...")
    subprocess.run(["pytest", "roster/tests/", "--cov=roster", "--cov-report=term", "--cov-report=html", "-v"])

    print("Tests completed! Coverage report available in htmlcov/ directory")


if __name__ == "__main__":
    main()
