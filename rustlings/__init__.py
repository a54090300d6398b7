"""Helpers for Rust exercises: terminal messages, rust-project.json generation and worked solutions."""

__version__ = "5.4.1"