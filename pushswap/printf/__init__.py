"""A printf-style formatter with flags, width and precision."""