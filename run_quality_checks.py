#!/usr/bin/env python
"""Local quality checks and test runner.

Runs formatting, import ordering, lint, type, dead-code and complexity checks
followed by the pytest suite with coverage.

Usage:
    python run_quality_checks.py                    # Run all checks (no fixes)
    python run_quality_checks.py --fix              # Let black/isort rewrite files
    python run_quality_checks.py --skip lint type   # Skip named checks
"""

import argparse
import subprocess
import sys

PACKAGE_DIR = "amida"
TESTS_DIR = "tests"
DIRS_TO_CHECK = [PACKAGE_DIR, TESTS_DIR]


class CheckRunner:
    """Runs quality checks and tests, collecting pass/fail results."""

    def __init__(self, fix: bool = False, verbose: bool = False, skip_checks: list[str] = None):
        self.fix = fix
        self.verbose = verbose
        self.skip_checks = skip_checks or []
        self.failed_checks: list[str] = []
        self.passed_checks: list[str] = []

    def run_command(self, key: str, cmd: list[str], name: str, always_show: bool = False) -> bool:
        """Run one check command and record the outcome.

        Args:
            key: Short check name used by --skip
            cmd: Command and arguments as list
            name: Friendly name printed in the summary
            always_show: Stream output even without --verbose

        Returns:
            True if the command succeeded or was skipped
        """
        if key in self.skip_checks:
            print(f"-- skipping {name}")
            return True

        print(f"\n{'=' * 70}\n>> {name}\n{'=' * 70}")
        try:
            if self.verbose or always_show:
                success = subprocess.run(cmd, check=False).returncode == 0
            else:
                result = subprocess.run(cmd, check=False, capture_output=True, text=True)
                success = result.returncode == 0
                if not success:
                    print(result.stdout)
                    print(result.stderr)
        except FileNotFoundError as exc:
            print(f"!! {exc}")
            print('   Install the tooling with: pip install -e ".[test,dev]"')
            success = False

        (self.passed_checks if success else self.failed_checks).append(name)
        print(f"{'ok' if success else 'FAILED'}: {name}")
        return success

    def checks(self) -> list[tuple[str, list[str], str]]:
        black = ["black", *DIRS_TO_CHECK] if self.fix else ["black", "--check", *DIRS_TO_CHECK]
        isort = ["isort", *DIRS_TO_CHECK] if self.fix else ["isort", "--check-only", *DIRS_TO_CHECK]
        return [
            ("formatting", black, "Black formatting"),
            ("imports", isort, "isort import ordering"),
            ("lint", ["pylint", PACKAGE_DIR], "Pylint"),
            ("type", ["mypy", PACKAGE_DIR], "Mypy"),
            ("deadcode", ["vulture", PACKAGE_DIR], "Vulture dead code"),
            ("complexity", ["radon", "cc", PACKAGE_DIR, "-a"], "Radon complexity"),
            (
                "tests",
                ["pytest", f"--cov={PACKAGE_DIR}", "--cov-report=term-missing", TESTS_DIR],
                "Pytest + coverage",
            ),
        ]

    def print_summary(self) -> None:
        print(f"\n{'=' * 70}\nSUMMARY\n{'=' * 70}")
        for label, names in (("Passed", self.passed_checks), ("Failed", self.failed_checks)):
            if names:
                print(f"{label} ({len(names)}):")
                for name in names:
                    print(f"   - {name}")
        if not self.failed_checks:
            print("All checks passed.")

    def run_all(self) -> int:
        """Run every check in order. Returns a process exit code."""
        for key, cmd, name in self.checks():
            self.run_command(key, cmd, name, always_show=key in ("complexity", "tests"))
        self.print_summary()
        return 1 if self.failed_checks else 0


def main(argv: list[str] = None) -> int:
    parser = argparse.ArgumentParser(description="Run local quality checks and tests")
    parser.add_argument("--fix", "--apply", action="store_true", dest="fix",
                        help="Let black and isort rewrite files")
    parser.add_argument("--verbose", "-v", action="store_true",
                        help="Show output from every command")
    parser.add_argument("--skip", nargs="+", default=[],
                        help="Checks to skip (formatting, imports, lint, type, deadcode, complexity, tests)")
    args = parser.parse_args(argv)

    runner = CheckRunner(fix=args.fix, verbose=args.verbose, skip_checks=args.skip)
    return runner.run_all()


if __name__ == "__main__":
    sys.exit(main())
