"""Small character, string, line-reading and output helpers."""