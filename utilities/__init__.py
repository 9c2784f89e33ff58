"""
Utilities Layer
- Provides cross-cutting functionality
- Implements system-wide monitoring and logging
"""
