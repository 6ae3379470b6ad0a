import os
import uuid
from werkzeug.utils import secure_filename
from flask import current_app
from storefront.errors import ValidationError

ALLOWED_EXTENSIONS = {'png', 'jpg', 'jpeg', 'gif', 'webp', 'svg'}


def allowed_file(filename):
    return '.' in filename and filename.rsplit('.', 1)[1].lower() in ALLOWED_EXTENSIONS


def save_file(file, subfolder=""):
    """Store an uploaded image and return the public path it is served from."""
    if not file or not file.filename:
        raise ValidationError("No file uploaded")
    if not allowed_file(file.filename):
        raise ValidationError("File type not allowed")

    filename = secure_filename(file.filename)
    ext = filename.rsplit('.', 1)[1].lower()
    unique_filename = f"{uuid.uuid4().hex}.{ext}"

    upload_folder = os.path.join(current_app.config.get('UPLOAD_FOLDER', 'uploads'), subfolder)
    os.makedirs(upload_folder, exist_ok=True)
    file.save(os.path.join(upload_folder, unique_filename))

    upload_url = current_app.config.get('UPLOAD_URL', '/uploads').rstrip('/')
    return "/".join(part for part in (upload_url, subfolder.strip('/'), unique_filename) if part)


def delete_file(file_url):
    """
    Deletes a previously uploaded file given its public path.
    Remote URLs and paths outside the upload URL are ignored.
    """
    upload_url = current_app.config.get('UPLOAD_URL', '/uploads').rstrip('/') + '/'
    if not file_url or not file_url.startswith(upload_url):
        return False

    relative = file_url[len(upload_url):]
    file_path = os.path.join(current_app.config.get('UPLOAD_FOLDER', 'uploads'), relative)

    if os.path.exists(file_path):
        try:
            os.remove(file_path)
            return True
        except OSError as e:
            current_app.logger.error(f"Failed to delete file {file_path}: {e}")
            return False
    return False
