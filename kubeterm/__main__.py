"""
Entry point for running kubeterm as a module: `python -m kubeterm`

Both this and the `kubeterm` console script call the same `main()`.
"""

from .main import main

if __name__ == "__main__":
    main()
