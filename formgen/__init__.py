"""formgen — Form Generator.

Validate user-authored JSON form schemas, compile them into runtime data
validators, and generate equivalent form code.
"""

__version__ = "0.1.0"
