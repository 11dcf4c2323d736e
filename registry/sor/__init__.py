"""
System of Record Domain

Each upstream feeding system (SOR) reports its own view of a person and of
that person's roles. These records are kept as sent and reconciled into the
canonical Person by the person services.
"""
