from django.contrib import messages
from django.http import FileResponse, Http404
from django.shortcuts import render, redirect
from django.utils import timezone
from django.views import View
from django.views.generic import TemplateView

from accounts.mixins import ProfileOwnerRequiredMixin
from profiles import store
from .forms import UploadFileForm


class UploadView(ProfileOwnerRequiredMixin, View):
    """Upload page; POST stores the file on the owner's profile"""
    template_name = 'documents/upload.html'

    def get(self, request, pk):
        profile = store.get_profile(pk, with_files=False)
        return self._render(profile, UploadFileForm())

    def post(self, request, pk):
        profile = store.get_profile(pk, with_files=False)
        form = UploadFileForm(request.POST, request.FILES)
        if not form.is_valid():
            messages.error(request, "Can't upload the file :(")
            return self._render(profile, form)
        store.add_file(profile.user, form)
        messages.success(request, 'File uploaded.')
        return redirect('documents:file_list', pk=pk)

    def _render(self, profile, form):
        return render(self.request, self.template_name, {
            'profile': profile,
            'form': form,
            'today': timezone.now(),
        })


class FileDetailView(ProfileOwnerRequiredMixin, TemplateView):
    """Show a single uploaded file"""
    template_name = 'documents/show_file.html'

    def get_context_data(self, **kwargs):
        context = super().get_context_data(**kwargs)
        profile = store.get_profile(self.kwargs['pk'], with_files=False)
        context['profile'] = profile
        context['uploaded'] = store.get_file(profile.user, self.kwargs['file_id'])
        return context


class FileDownloadView(ProfileOwnerRequiredMixin, View):
    """Stream an uploaded file back to its owner"""

    def get(self, request, pk, file_id):
        profile = store.get_profile(pk, with_files=False)
        uploaded = store.get_file(profile.user, file_id)
        try:
            handle = uploaded.file.open('rb')
        except OSError:
            raise Http404('File is missing from storage.')
        return FileResponse(handle, as_attachment=not uploaded.is_image, filename=uploaded.filename)


class FileListView(ProfileOwnerRequiredMixin, TemplateView):
    """All files uploaded by the owner"""
    template_name = 'documents/file_list.html'

    def get_context_data(self, **kwargs):
        context = super().get_context_data(**kwargs)
        context['profile'] = store.get_profile(self.kwargs['pk'])
        return context
