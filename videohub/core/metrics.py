from prometheus_client import Counter

REQUEST_COUNTER = Counter("videohub_api_requests_total", "Total API requests", ["path"])
VIDEO_UPLOADS = Counter("videohub_video_uploads_total", "Video upload pipeline runs", ["status"])
S3_OPS = Counter("videohub_s3_operations_total", "Object store operations", ["op", "status"])
MEDIA_TOOL_RUNS = Counter("videohub_media_tool_runs_total", "External media tool runs", ["tool", "status"])
