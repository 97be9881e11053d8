"""Time values, message encoding and checksummed serial framing for a rosserial-style link."""

__version__ = "0.1.0"
__all__ = ["duration", "rostime", "msg", "std_msgs", "smart_device_protocol", "framing"]