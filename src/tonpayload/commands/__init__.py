"""
Commands - click command groups for the tonpayload CLI.

- address: parse / format / friendly / validate
- payload: jetton / nft
"""
