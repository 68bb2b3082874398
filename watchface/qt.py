"""Qt binding selection shared by the render surface and the timer."""
import importlib
import sys


for qt_lib in ('PyQt5', 'PySide2', 'PyQt6', 'PySide6', None):
    if qt_lib is None:
        raise ImportError("No suitable Qt library found.")
    try:
        QtWidgets = importlib.import_module(qt_lib + '.QtWidgets')
        QtCore = importlib.import_module(qt_lib + '.QtCore')
        QtGui = importlib.import_module(qt_lib + '.QtGui')
        break
    except ImportError:
        pass

QT_LIB = qt_lib


def qt_enum(scoped, unscoped):
    """Look up an enum member by its Qt6 scoped path, falling back to Qt5.

    Both arguments are dotted paths relative to the QtCore/QtGui namespace,
    e.g. ``qt_enum('Qt.AspectRatioMode.KeepAspectRatio', 'Qt.KeepAspectRatio')``.
    """
    for path in (scoped, unscoped):
        for root in (QtCore, QtGui, QtWidgets):
            obj = root
            try:
                for part in path.split('.'):
                    obj = getattr(obj, part)
            except AttributeError:
                continue
            return obj
    raise AttributeError(f"{scoped!r} not found in {QT_LIB}")


def get_app(argv=None):
    """Return the running QApplication, creating one if needed."""
    app = QtWidgets.QApplication.instance()
    if app is None:
        app = QtWidgets.QApplication(sys.argv if argv is None else argv)
    return app


def run_app():
    app = QtWidgets.QApplication.instance()
    if sys.flags.interactive != 1:
        if hasattr(app, 'exec_'):
            return app.exec_()
        else:
            return app.exec()
    return 0
