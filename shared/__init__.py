"""
Request and response models shared by the FAQ service and its client.
"""
