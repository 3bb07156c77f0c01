from django.urls import path

from .views import ContactPageView, IdeaPageView, PageView, ProjectsPageView

app_name = "submissions"

urlpatterns = [
    path('', PageView.as_view(template_name="index.html", nav="home"), name='home'),
    path('index.html', PageView.as_view(template_name="index.html", nav="home"), name='index'),
    path('about-us.html', PageView.as_view(template_name="about-us.html", nav="about"), name='about'),
    path('contact-us.html', ContactPageView.as_view(), name='contact'),
    path('projects.html', ProjectsPageView.as_view(), name='projects'),
    path('idea.html', IdeaPageView.as_view(), name='idea'),
]
