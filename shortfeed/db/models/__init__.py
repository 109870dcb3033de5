from shortfeed.db.models.user import User, UserCourse
from shortfeed.db.models.video import Video, VideoLike, Comment
