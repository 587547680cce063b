#!/usr/bin/env python3
"""Development setup script for Stocks App."""

import subprocess
import sys
from pathlib import Path


def run_command(cmd: str, description: str) -> bool:
    """Run a command and return success status."""
    print(f"🔧 {description}...")
    try:
        subprocess.run(cmd, shell=True, check=True, capture_output=True, text=True)
        print(f"✅ {description} completed successfully")
        return True
    except subprocess.CalledProcessError as e:
        print(f"❌ {description} failed:")
        print(f"Command: {cmd}")
        print(f"Error: {e.stderr}")
        return False


def main():
    """Main setup function."""
    print("🚀 Setting up Stocks App development environment...")

    if not Path("pyproject.toml").exists():
        print("❌ No pyproject.toml found. Please run this script from the project root.")
        sys.exit(1)

    # Install dependencies
    if not run_command("poetry install --extras dev", "Installing dependencies"):
        sys.exit(1)

    # Run initial code quality checks
    if not run_command("poetry run ruff check stocks_app", "Running linter checks"):
        print("⚠️  Linter found issues. Run 'poetry run ruff check --fix stocks_app' to fix.")

    # Run type checking
    if not run_command("poetry run mypy stocks_app", "Running type checker"):
        print("⚠️  Type checker found issues. Please review and fix.")

    # Run tests
    if not run_command("poetry run pytest", "Running test suite"):
        print("⚠️  Some tests failed. Please review and fix.")

    print("\n🎉 Development environment setup complete!")
    print("\nNext steps:")
    print("1. Review any warnings above")
    print("2. Run a report with: poetry run stocks --from 2024-01-02")
    print("3. Run tests with: poetry run pytest")


if __name__ == "__main__":
    main()
