"""
Clipgroup - Camera video grouping tool.

Copies the MVI_####.MOV clips of a camera memory card into named group
folders by:
- Cataloguing clips by the sequential ID embedded in their filename
- Collecting half-open ID ranges interactively or one per shooting day
- Rejecting overlapping ranges before anything is written
- Copying each range into its own output folder
"""

__version__ = "0.1.0"
