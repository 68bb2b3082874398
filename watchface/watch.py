import logging
import math

from . import config
from .qt import QtCore, QtGui, QtWidgets, qt_enum

logger = logging.getLogger(__name__)


def pil_to_pixmap(image):
    """Convert a PIL image to a QPixmap."""
    image = image.convert('RGBA')
    data = image.tobytes('raw', 'RGBA')
    image_format = qt_enum('QImage.Format.Format_RGBA8888', 'QImage.Format_RGBA8888')
    qimage = QtGui.QImage(data, image.width, image.height, image.width * 4, image_format)
    # copy() detaches the QImage from the Python-owned buffer
    return QtGui.QPixmap.fromImage(qimage.copy())


class WatchWidget(QtWidgets.QWidget):
    """Description label above the face with its three rotating hands.

    Showing the widget starts the model's ticks; closing it stops them.
    """

    def __init__(self, model, images, parent=None):
        super().__init__(parent)
        self.setWindowTitle(config.WINDOW_TITLE)
        self.model = model

        face_width, face_height = images['face'].size
        self.face_center = (face_width / 2, face_height / 2)

        self.label = QtWidgets.QLabel()
        self.label.setAlignment(qt_enum('Qt.AlignmentFlag.AlignCenter', 'Qt.AlignCenter'))

        # Create scene and view
        self.scene = QtWidgets.QGraphicsScene()
        self.view = QtWidgets.QGraphicsView(self.scene)
        self.view.setRenderHint(qt_enum('QPainter.RenderHint.Antialiasing', 'QPainter.Antialiasing'))
        self.view.setRenderHint(qt_enum('QPainter.RenderHint.SmoothPixmapTransform',
                                        'QPainter.SmoothPixmapTransform'))
        self.view.setFixedSize(face_width, face_height)
        self.view.setSceneRect(0, 0, face_width, face_height)
        self.view.setHorizontalScrollBarPolicy(qt_enum('Qt.ScrollBarPolicy.ScrollBarAlwaysOff',
                                                       'Qt.ScrollBarAlwaysOff'))
        self.view.setVerticalScrollBarPolicy(qt_enum('Qt.ScrollBarPolicy.ScrollBarAlwaysOff',
                                                     'Qt.ScrollBarAlwaysOff'))

        layout = QtWidgets.QVBoxLayout()
        layout.addWidget(self.label)
        layout.addWidget(self.view)
        self.setLayout(layout)

        # Layers bottom to top; hands rotate about the face center
        smooth = qt_enum('Qt.TransformationMode.SmoothTransformation', 'Qt.SmoothTransformation')
        self.items = {}
        for name in config.IMAGE_NAMES:
            item = self.scene.addPixmap(pil_to_pixmap(images[name]))
            item.setTransformationMode(smooth)
            item.setTransformOriginPoint(QtCore.QPointF(*self.face_center))
            self.items[name] = item

        self._unsubscribe = model.subscribe(self.show_reading)
        self.show_reading(model.reading)

    def show_reading(self, reading):
        """Apply a reading to the label and hand items."""
        self.label.setText(reading.description)
        # Qt rotation is clockwise in degrees, matching the reading's convention
        hand_angles = (reading.hour_angle, reading.minute_angle, reading.second_angle)
        for name, angle in zip(config.HAND_NAMES, hand_angles):
            self.items[name].setRotation(math.degrees(angle))

    def showEvent(self, event):
        super().showEvent(event)
        # A closed widget keeps its last reading if shown again
        if self.model.source.state == self.model.source.STOPPED:
            logger.debug("Watch window re-shown after close; ticks stay stopped")
            return
        self.model.start()

    def closeEvent(self, event):
        logger.debug("Watch window closing")
        self.model.stop()
        self._unsubscribe()
        super().closeEvent(event)
