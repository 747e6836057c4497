import os

from django.db import models
from django.conf import settings


class UploadedFile(models.Model):
    """A file a user uploaded to their profile"""

    user = models.ForeignKey(
        settings.AUTH_USER_MODEL,
        on_delete=models.CASCADE,
        related_name='files'
    )
    title = models.CharField(max_length=200)
    description = models.TextField(blank=True)
    file = models.FileField(upload_to='uploads/%Y/%m/%d/')
    created_at = models.DateTimeField(auto_now_add=True)

    class Meta:
        db_table = 'uploaded_files'
        verbose_name = 'Uploaded File'
        verbose_name_plural = 'Uploaded Files'
        ordering = ['-created_at']

    def __str__(self):
        return f"{self.title} - {self.user.username}"

    @property
    def filename(self):
        return os.path.basename(self.file.name) if self.file else ''

    @property
    def is_image(self):
        return self.filename.lower().endswith(('.png', '.jpg', '.jpeg', '.gif', '.webp'))

    @property
    def file_size(self):
        """Get file size in human readable format"""
        if self.file:
            try:
                size = self.file.size
            except OSError:
                return ''
            for unit in ['B', 'KB', 'MB', 'GB']:
                if size < 1024.0:
                    return f"{size:.2f} {unit}"
                size /= 1024.0
            return f"{size:.2f} TB"
        return "0 B"
