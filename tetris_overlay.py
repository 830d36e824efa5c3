import pygame

def format_score(score):
    if float(score).is_integer(): return str(int(score))
    return f"{score:.10g}"

class GameOverScreen:
    """Translucent banner over the board: game over with final score, or paused."""
    def __init__(self):
        self.active=False
        self.final_score=0

    def show(self,score):
        self.active=True; self.final_score=score

    def hide(self): self.active=False

    def _banner(self,screen,font,big_font,rect,title,hint):
        s=pygame.Surface(rect.size,pygame.SRCALPHA); s.fill((20,25,40,210))
        screen.blit(s,rect.topleft)
        t=big_font.render(title,True,(255,220,220))
        screen.blit(t,t.get_rect(center=(rect.centerx,rect.centery-16)))
        h=font.render(hint,True,(200,210,235))
        screen.blit(h,h.get_rect(center=(rect.centerx,rect.centery+18)))

    def draw(self,screen,font,big_font,rect):
        if not self.active: return
        self._banner(screen,font,big_font,rect,"GAME OVER",f"Score {format_score(self.final_score)} - Enter to play")

    def draw_paused(self,screen,font,big_font,rect):
        self._banner(screen,font,big_font,rect,"PAUSED","P to resume")
