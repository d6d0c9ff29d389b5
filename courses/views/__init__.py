from .course_views import *
from .outline_views import *
from .progress_views import *
