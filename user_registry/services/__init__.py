"""Services Layer — orchestrates pure core rules around persistence IO.

Invariants:
    - Services return outcome values (Ok/Err, Found/NotFound), they never raise
      for business failures
    - Services depend on core protocols, not on SQLAlchemy
"""
