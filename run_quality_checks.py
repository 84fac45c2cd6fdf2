#!/usr/bin/env python
"""Local quality checks and tests runner with auto-fix capabilities.

Runs formatting, import ordering, lint, typing, dead code and complexity
checks over the i2c_timing package, then the pytest suite with coverage.

Usage:
    python run_quality_checks.py                    # Run all checks (no fixes)
    python run_quality_checks.py --fix              # Run all checks + auto fixes
    python run_quality_checks.py --fix --skip lint  # Fix but skip linting
    python run_quality_checks.py --verbose          # Detailed output
"""

import argparse
import subprocess
import sys

# Directories to check
PACKAGE_DIR = "i2c_timing"
TESTS_DIR = "tests"
DIRS_TO_CHECK = [PACKAGE_DIR, TESTS_DIR]


class CheckRunner:
    """Runs quality checks and tests with optional auto-fixes."""

    def __init__(self, fix: bool = False, verbose: bool = False, skip_checks: list[str] = None):
        self.fix = fix
        self.verbose = verbose
        self.skip_checks = skip_checks or []
        self.failed_checks: list[str] = []
        self.passed_checks: list[str] = []

    def run_command(self, cmd: list[str], name: str, key: str) -> bool:
        """Run a shell command and return success status.

        Args:
            cmd: Command and arguments as list
            name: Friendly name for the check
            key: Short name accepted by --skip

        Returns:
            True if command succeeded or was skipped, False otherwise
        """
        if key in self.skip_checks:
            print(f"-- Skipping {name}")
            return True

        print(f"\n{'=' * 70}")
        print(f">> Running: {name}")
        print(f"{'=' * 70}")

        try:
            if self.verbose:
                result = subprocess.run(cmd, check=False)
            else:
                result = subprocess.run(cmd, check=False, capture_output=True, text=True)
                if result.returncode != 0:
                    print(result.stdout)
                    print(result.stderr)
        except FileNotFoundError as e:
            print(f"FAIL: {e}")
            print("   Make sure all tools are installed: pip install -e .[test,dev]")
            self.failed_checks.append(name)
            return False

        if result.returncode == 0:
            print(f"PASS: {name}")
            self.passed_checks.append(name)
            return True

        print(f"FAIL: {name}")
        self.failed_checks.append(name)
        return False

    def check_black_formatting(self) -> bool:
        """Check and optionally fix code formatting with Black."""
        cmd = ["black", *DIRS_TO_CHECK] if self.fix else ["black", "--check", *DIRS_TO_CHECK]
        return self.run_command(cmd, "Black Formatting", "formatting")

    def check_isort_imports(self) -> bool:
        """Check and optionally fix import ordering with isort."""
        cmd = ["isort", *DIRS_TO_CHECK] if self.fix else ["isort", "--check-only", *DIRS_TO_CHECK]
        return self.run_command(cmd, "isort Import Ordering", "imports")

    def check_pylint(self) -> bool:
        return self.run_command(["pylint", PACKAGE_DIR], "Pylint Code Quality Check", "lint")

    def check_mypy(self) -> bool:
        return self.run_command(["mypy", PACKAGE_DIR], "Mypy Type Checking", "type")

    def check_vulture(self) -> bool:
        return self.run_command(
            ["vulture", PACKAGE_DIR], "Vulture Dead Code Check", "deadcode"
        )

    def check_radon_complexity(self) -> bool:
        return self.run_command(
            ["radon", "cc", PACKAGE_DIR, "-a"], "Radon Code Complexity Check", "complexity"
        )

    def run_tests(self) -> bool:
        """Run pytest with coverage."""
        return self.run_command(
            ["pytest", f"--cov={PACKAGE_DIR}", "--cov-report=term-missing", TESTS_DIR],
            "Pytest + Coverage",
            "tests",
        )

    def print_summary(self) -> None:
        """Print summary of check results."""
        print(f"\n{'=' * 70}")
        print("SUMMARY")
        print(f"{'=' * 70}")

        if self.passed_checks:
            print(f"\nPassed ({len(self.passed_checks)}):")
            for check in self.passed_checks:
                print(f"   - {check}")

        if self.failed_checks:
            print(f"\nFailed ({len(self.failed_checks)}):")
            for check in self.failed_checks:
                print(f"   - {check}")
        else:
            print("\nAll checks passed!")

    def run_all(self) -> int:
        """Run all checks in order.

        Returns:
            0 if all checks passed, non-zero otherwise
        """
        checks = [
            self.check_black_formatting,
            self.check_isort_imports,
            self.check_pylint,
            self.check_mypy,
            self.check_vulture,
            self.check_radon_complexity,
            self.run_tests,
        ]

        for check_func in checks:
            check_func()

        self.print_summary()

        return 0 if not self.failed_checks else 1


def main() -> int:
    parser = argparse.ArgumentParser(
        description="Run local quality checks and tests with optional auto-fixes",
    )
    parser.add_argument(
        "--fix",
        "--apply",
        action="store_true",
        dest="fix",
        help="Automatically fix issues (formatting, imports) where possible",
    )
    parser.add_argument(
        "--verbose",
        "-v",
        action="store_true",
        help="Show detailed output from all commands",
    )
    parser.add_argument(
        "--skip",
        nargs="+",
        default=[],
        help="Skip specific checks (formatting, imports, lint, type, deadcode, complexity, tests)",
    )

    args = parser.parse_args()

    runner = CheckRunner(fix=args.fix, verbose=args.verbose, skip_checks=args.skip)
    return runner.run_all()


if __name__ == "__main__":
    sys.exit(main())
