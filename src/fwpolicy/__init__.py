"""fwpolicy — compile declarative firewall policy into iptables-restore input."""

__version__ = "0.1.0"
