#!/usr/bin/env python3
"""
Test runner for the semantic engine.

Shortcuts for the common pytest invocations.
"""

import subprocess
import sys

COMMANDS = {
    "all": ("python -m pytest tests/ -v", "Running All Tests (Verbose)"),
    "quick": ("python -m pytest tests/", "Running All Tests (Quick)"),
    "unit": ("python -m pytest -m unit -v", "Running Unit Tests"),
    "integration": ("python -m pytest -m integration -v", "Running Integration Tests"),
    "parser": ("python -m pytest tests/test_turtle_parser.py -v", "Running Turtle Parser Tests"),
    "queries": ("python -m pytest tests/test_queries.py -v", "Running Query Tests"),
    "cli": ("python -m pytest tests/test_cli.py -v", "Running CLI Tests"),
    "coverage": (
        "python -m pytest tests/ --cov=sinople_semantic --cov-report=html --cov-report=term",
        "Running Tests with Coverage",
    ),
}


def run_command(cmd, description):
    """Run a command and print results"""
    print(f"\n{'=' * 70}")
    print(f"  {description}")
    print('=' * 70)
    result = subprocess.run(cmd, shell=True)
    return result.returncode


def main():
    if len(sys.argv) < 2:
        print("""
Semantic Engine Test Runner

Usage:
    python run_tests.py <command>

Commands:
    all          - Run all tests with verbose output
    quick        - Run all tests quickly (no verbose)
    unit         - Run only unit tests (fast)
    integration  - Run integration tests
    parser       - Run Turtle parser tests
    queries      - Run domain query tests
    cli          - Run command line tests
    coverage     - Run with coverage report (requires pytest-cov)
    single TEST  - Run a specific test (e.g., 'single test_bidirectional_lookup')
""")
        return 1

    command = sys.argv[1].lower()

    if command == "single":
        if len(sys.argv) < 3:
            print("ERROR: Please specify a test name")
            return 1
        test_name = sys.argv[2]
        return run_command(f"python -m pytest tests/ -k {test_name} -v", f"Running Single Test: {test_name}")

    if command not in COMMANDS:
        print(f"ERROR: Unknown command '{command}'")
        print("Run 'python run_tests.py' to see available commands")
        return 1

    cmd, description = COMMANDS[command]
    return run_command(cmd, description)


if __name__ == "__main__":
    sys.exit(main())
