"""Test suite for the Clientele customer registry.

Organized into three categories:

1. core/: Unit tests for core domain logic
   - No third-party dependencies, fast execution
   - Uses in-memory fakes for ports

2. adapters/: Tests for adapter implementations
   - Random id source and CLI command handler

3. fakes/: Port implementations for testing
   - In-memory implementations of IdSourcePort and CustomerFactoryPort
   - Used by core unit tests
"""
