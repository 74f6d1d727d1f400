#!/usr/bin/env python3
"""
Main test runner for the Lox scanner tests.

Author: xwest
"""

import sys
import os
import unittest

# Add the project root to the Python path
project_root = os.path.abspath(os.path.dirname(__file__))
sys.path.insert(0, project_root)


def run_all_tests():
    """Run all Lox scanner tests."""

    print("Lox Scanner Test Suite")
    print("=" * 60)

    # Test if basic imports work
    try:
        from lox.lexer import scan

        print("Scanner modules imported successfully")
        print()

    except ImportError as e:
        print(f"Failed to import scanner modules: {e}")
        return False

    # Quick smoke scan before the full suite
    print("Testing a simple scan...")
    code = """
    fun add(a, b) {
        return a + b;
    }
    print add(5, 10.5);
    """
    tokens, errors = scan(code)
    print(f"  Generated {len(tokens)} tokens, {len(errors)} errors")
    if errors:
        for error in errors:
            print(f"  {error}")
        return False
    print()

    suite = unittest.defaultTestLoader.discover(os.path.join(project_root, "tests"))
    result = unittest.TextTestRunner(verbosity=2).run(suite)

    print()
    print("=" * 60)
    if result.wasSuccessful():
        print(f"All {result.testsRun} tests PASSED")
    else:
        print(f"{len(result.failures)} failures, {len(result.errors)} errors "
              f"in {result.testsRun} tests")
    print("=" * 60)

    return result.wasSuccessful()


if __name__ == "__main__":
    success = run_all_tests()
    sys.exit(0 if success else 1)
