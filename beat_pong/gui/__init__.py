"""
PyGame front end of Beat Pong
"""
