"""
Agebmi knowledge base.

Contains the reference data the engine classifies against:
- Age-adjusted healthy BMI bands
- Category display metadata
- Age-group disclaimers
- Advice message templates
"""
