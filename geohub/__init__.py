"""
GeoHub API: forums, job board, resource library, events and messaging
for a professional network of geologists.
"""
