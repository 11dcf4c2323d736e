"""
Registry Module

Routes to the registry sub-apps:
- person: canonical person identity
- sor: System of Record views of people and their roles
"""
