"""Kotlin code generation for processed icons."""
