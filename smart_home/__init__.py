"""
Smart Home Root Module

This module serves as the root for the smart home device demonstration.

Layer Structure:
- Domain: Devices, the device collection, comparers and introspection
- Application: Use cases orchestrating status display, sorting and reports
- Infrastructure: Output sink implementations (console, in-memory buffer)
- Shared: Cross-cutting concerns and shared utilities
- Main: Composition root, configuration and the demo entry point
"""
