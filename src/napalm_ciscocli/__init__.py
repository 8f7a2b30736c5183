"""NAPALM driver for Cisco IOS switches managed over an interactive SSH shell."""

from napalm_ciscocli.driver import CiscoCliDriver

__all__ = ["CiscoCliDriver"]
