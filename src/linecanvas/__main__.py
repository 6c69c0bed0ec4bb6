"""Run with: python -m linecanvas"""
from linecanvas.main import main

if __name__ == "__main__":
    main()
