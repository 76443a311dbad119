"""
Comprehensive Test Suite Runner

This script runs all tests across the entire project in the correct order:
1. Hook registry tests
2. Module options and settings tests
3. Module system tests (registry, base class, manager, CLI)
4. Feature module tests

Usage:
    python run_all_tests.py
    python run_all_tests.py --verbose
    python run_all_tests.py --suite hooks
    python run_all_tests.py --suite feature_modules
    python run_all_tests.py --suite all
"""

import argparse
import subprocess
import sys
import time
from pathlib import Path
from typing import Dict, List, Tuple

SUITE_ORDER = ["hooks", "options", "modules", "feature_modules"]


class TestSuite:
    """Represents a test suite with its tests."""

    def __init__(self, name: str, description: str):
        self.name = name
        self.description = description
        self.tests: List[Dict] = []

    def add_test(self, test_name: str, test_path: Path, description: str = ""):
        """Add a test file or directory to this suite."""
        self.tests.append({
            'name': test_name,
            'path': test_path,
            'description': description
        })


class ComprehensiveTestRunner:
    """Manages execution of all project test suites."""

    def __init__(self):
        self.suites: Dict[str, TestSuite] = {}
        self.setup_test_suites()

    def setup_test_suites(self):
        """Define all test suites and their tests."""
        base_dir = Path(__file__).parent

        hooks_suite = TestSuite("hooks", "Hook Registry Tests")
        hooks_suite.add_test("registry", base_dir / "hook_tests" / "test_hook_registry.py", "Priorities, removal and callable names")
        self.suites["hooks"] = hooks_suite

        options_suite = TestSuite("options", "Module Options Tests")
        options_suite.add_test("options_file", base_dir / "options_tests" / "test_options_file.py", "Options file and settings")
        self.suites["options"] = options_suite

        modules_suite = TestSuite("modules", "Module System Tests")
        modules_suite.add_test("registry", base_dir / "module_tests" / "test_module_registry.py", "Identifier resolution and caching")
        modules_suite.add_test("definition", base_dir / "module_tests" / "test_module_definition.py", "Lifecycle and hook gate")
        modules_suite.add_test("manager", base_dir / "module_tests" / "test_module_manager.py", "Booting from the options file")
        modules_suite.add_test("cli", base_dir / "module_tests" / "test_module_cli.py", "Command-line interface")
        self.suites["modules"] = modules_suite

        feature_suite = TestSuite("feature_modules", "Feature Module Tests")
        feature_suite.add_test("feature_modules", base_dir / "feature_module_tests", "Every shipped module")
        self.suites["feature_modules"] = feature_suite

    def run_test(self, test_name: str, test_path: Path, verbose: bool = False) -> bool:
        """Run a single test file or directory with pytest."""
        print(f"\n{'='*60}")
        print(f"RUNNING {test_name.upper()}")
        print(f"{'='*60}")

        start_time = time.time()
        cmd = [sys.executable, "-m", "pytest", str(test_path), "-v" if verbose else "-q"]

        result = subprocess.run(cmd, capture_output=not verbose, text=True)
        duration = time.time() - start_time

        if result.returncode == 0:
            print(f"\n✅ {test_name} completed successfully in {duration:.2f}s")
            return True

        print(f"\n❌ {test_name} failed in {duration:.2f}s")
        if not verbose and result.stdout:
            print("STDOUT:", result.stdout)
        if not verbose and result.stderr:
            print("STDERR:", result.stderr)
        return False

    def run_suite(self, suite_name: str, verbose: bool = False) -> Tuple[int, int]:
        """Run all tests in a suite."""
        suite = self.suites[suite_name]
        print(f"\nSTARTING {suite.name.upper()} TEST SUITE")
        print(f"{suite.description}")
        print("=" * 80)

        passed = 0
        total = len(suite.tests)

        for test in suite.tests:
            if self.run_test(test['name'], test['path'], verbose):
                passed += 1

        print(f"\n{suite.name.upper()} SUITE RESULTS: {passed}/{total} passed")
        return passed, total

    def run_all_suites(self, verbose: bool = False) -> bool:
        """Run all test suites."""
        total_passed = 0
        total_tests = 0
        suite_results = {}

        for suite_name in SUITE_ORDER:
            passed, total = self.run_suite(suite_name, verbose)
            suite_results[suite_name] = (passed, total)
            total_passed += passed
            total_tests += total

        # Final summary
        print("\n" + "=" * 80)
        print("COMPREHENSIVE TEST RESULTS")
        print("=" * 80)

        for suite_name, (passed, total) in suite_results.items():
            status = "✅" if passed == total else "❌"
            print(f"{status} {self.suites[suite_name].description}: {passed}/{total}")

        if total_passed == total_tests:
            print("\n🎉 ALL TESTS PASSED!")
            return True

        print(f"\n⚠️  {total_tests - total_passed} test(s) failed.")
        print("💡 Use --verbose for detailed output")
        return False

    def list_suites(self):
        """List all available test suites."""
        print("Available Test Suites:")
        print("-" * 40)
        for suite_name in SUITE_ORDER:
            suite = self.suites[suite_name]
            print(f"\n{suite_name}: {suite.description}")
            for test in suite.tests:
                print(f"   • {test['name']}: {test['description']}")


def main() -> bool:
    """Main test runner entry point."""
    parser = argparse.ArgumentParser(description="Run comprehensive project tests")
    parser.add_argument("--suite", choices=["all"] + SUITE_ORDER,
                        default="all", help="Test suite to run")
    parser.add_argument("--verbose", action="store_true", help="Verbose output")
    parser.add_argument("--list", action="store_true", help="List available test suites")

    args = parser.parse_args()

    runner = ComprehensiveTestRunner()

    if args.list:
        runner.list_suites()
        return True

    start_time = time.time()

    try:
        if args.suite == "all":
            success = runner.run_all_suites(args.verbose)
        else:
            passed, total = runner.run_suite(args.suite, args.verbose)
            success = passed == total
    except KeyboardInterrupt:
        print("\n\n⚠️  Tests interrupted by user")
        return False

    print(f"\nTotal execution time: {time.time() - start_time:.2f}s")
    return success


if __name__ == "__main__":
    sys.exit(0 if main() else 1)
