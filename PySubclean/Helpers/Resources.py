import os

resources_dir = os.path.join(os.path.dirname(os.path.dirname(os.path.abspath(__file__))), "resources")

def GetResourcePath(*paths : str) -> str:
    """
    Get the path of a file shipped with the package
    """
    return os.path.join(resources_dir, *paths)
