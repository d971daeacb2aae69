"""
FedNow package - Proprietary FedNow Service messages.
"""
