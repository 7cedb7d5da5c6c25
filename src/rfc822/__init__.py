"""RFC 822 date-time parsing.

The parser validates a stamp such as `Mon, 02 Jan 2006 15:04:05 -0700` against the RFC 822 §5.1
grammar, checks that it names a real calendar date and time of day, and converts it into an
absolute UTC instant that can be compared with other parsed stamps.
"""
