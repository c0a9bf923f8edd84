# docsearch Package
"""
Search result presentation for a documentation site.

Components:
  - ResultGrouper: flat ranked hits -> named areas (priority + overflow)
  - ClickGate: decides whether a link activation is an in-app selection
  - SearchResultsPanel: headless view combining both with notifications
"""

__version__ = "0.1.0-dev"
