# main.py

from PyQt5.QtWidgets import QApplication
from config import CanvasConfig, setup_logging
from mainwindow import MainWindow
import sys

def main():
    setup_logging()
    config = CanvasConfig()
    app = QApplication(sys.argv)
    window = MainWindow(config)
    window.resize(config.window_width, config.window_height)
    window.show()
    sys.exit(app.exec_())


if __name__ == '__main__':
    main()
