"""
zonetrace CLI - Command-line interface over a YAML zone file.

Usage:
    zonetrace-cli --config zones.yaml list-zones
    zonetrace-cli --config zones.yaml point 120 45
    zonetrace-cli --config zones.yaml line 0 0 300 300
    zonetrace-cli --config zones.yaml trace parking 0,0 50,0 50,50 --close
"""

__version__ = "1.0.0"
